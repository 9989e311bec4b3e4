import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from tabthermo.cli import app

PHASE = {
    "name": "anode",
    "density": 2260.0,
    "species": {
        "Li": {"mw": 0.080, "cp": 20.0, "h_form": -500.0, "s0": 30.0},
        "V": {"mw": 0.072, "cp": 10.0, "h_form": 0.0, "s0": 5.0},
    },
    "mole_fractions": {"Li": 0.5, "V": 0.5},
    "tabulated": {
        "species": "Li",
        "enthalpy": [[0.0, 100.0], [0.5, 150.0], [1.0, 100.0]],
        "entropy": [[0.0, 10.0], [0.5, 20.0], [1.0, 10.0]],
    },
}


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.config = Path(self.tmp.name) / "phase.json"
        self.config.write_text(json.dumps(PHASE))

    def tearDown(self):
        self.tmp.cleanup()

    def test_evaluate(self):
        result = self.runner.invoke(app, ["evaluate", str(self.config), "--mole-fraction", "0.25"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["tracked_species"], "Li")
        self.assertAlmostEqual(data["tracked"]["reference_enthalpy"], 125.0)
        self.assertAlmostEqual(data["tracked"]["reference_entropy"], 15.0)
        self.assertEqual(data["species"]["V"]["activity_coefficient"], 1.0)
        self.assertAlmostEqual(data["species"]["V"]["mole_fraction"], 0.75)

    def test_evaluate_writes_output(self):
        output = Path(self.tmp.name) / "out.json"
        result = self.runner.invoke(app, ["evaluate", str(self.config), "--output", str(output)])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(output.read_text())
        self.assertEqual(data["tracked"]["reference_enthalpy"], 150.0)

    def test_sweep(self):
        result = self.runner.invoke(app, ["sweep", str(self.config), "--points", "5"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["x"], [0.0, 0.25, 0.5, 0.75, 1.0])
        for got, want in zip(data["reference_enthalpy"], [100.0, 125.0, 150.0, 125.0, 100.0]):
            self.assertAlmostEqual(got, want)

    def test_sweep_rejects_single_point(self):
        result = self.runner.invoke(app, ["sweep", str(self.config), "--points", "1"])
        self.assertNotEqual(result.exit_code, 0)

if __name__ == '__main__':
    unittest.main()
