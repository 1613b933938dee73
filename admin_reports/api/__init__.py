"""HTTP surface: Flask app serving report rows and export downloads."""
