import unittest
from decimal import Decimal
from admin_reports.exports.cells import (
    Boolean, CellType, Null, Number, Text, cell_text, cell_type, classify,
)


class TestCells(unittest.TestCase):
    def test_classify(self):
        self.assertEqual(classify(None), Null())
        self.assertEqual(classify(True), Boolean(True))
        self.assertEqual(classify(3), Number(3))
        self.assertEqual(classify(Decimal("1.50")), Number(Decimal("1.50")))
        self.assertEqual(classify("3"), Text("3"))
        self.assertEqual(classify(Text("x")), Text("x"))

    def test_cell_type(self):
        self.assertEqual(cell_type(1.5), CellType.NUMBER)
        self.assertEqual(cell_type(False), CellType.STRING)
        self.assertEqual(cell_type(None), CellType.STRING)
        self.assertEqual(cell_type("9"), CellType.STRING)
        self.assertEqual(CellType.NUMBER.value, "Number")

    def test_cell_text(self):
        self.assertEqual(cell_text(None), "")
        self.assertEqual(cell_text(Null()), "")
        self.assertEqual(cell_text(False), "false")
        self.assertEqual(cell_text(10.0), "10")
        self.assertEqual(cell_text(0.1), "0.1")
        self.assertEqual(cell_text(float("nan")), "NaN")
        self.assertEqual(cell_text(float("-inf")), "-Infinity")
        self.assertEqual(cell_text(Decimal("2.50")), "2.50")
        self.assertEqual(cell_text("as is"), "as is")

    def test_exponent_forms(self):
        self.assertEqual(cell_text(1e21), "1e+21")
        self.assertEqual(cell_text(1.5e300), "1.5e+300")
        self.assertEqual(cell_text(1e-7), "1e-7")
        self.assertEqual(cell_text(-2.5e-8), "-2.5e-8")
        self.assertEqual(cell_text(1.5e-5), "0.000015")
        self.assertEqual(cell_text(1e16), "10000000000000000")
        self.assertEqual(cell_text(1.2345678901234568e20), "123456789012345680000")


if __name__ == "__main__":
    unittest.main()
