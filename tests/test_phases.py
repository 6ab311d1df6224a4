import unittest
from junction.domain.models import DwellKind, LightColour
from junction.domain.phases import INITIAL_PHASE, PHASE_TABLE, Phase

ACTIVE = {LightColour.GO, LightColour.CAUTION}

class TestPhases(unittest.TestCase):
    def test_cycle_order(self):
        phase = INITIAL_PHASE
        seen = []
        for _ in range(8):
            seen.append(phase)
            phase = phase.successor()
        self.assertEqual(seen, [Phase.P1, Phase.P2, Phase.P3, Phase.P4] * 2)

    def test_colour_pairs(self):
        self.assertEqual((Phase.P1.colours.axisA, Phase.P1.colours.axisB), (LightColour.STOP, LightColour.GO))
        self.assertEqual((Phase.P2.colours.axisA, Phase.P2.colours.axisB), (LightColour.STOP, LightColour.CAUTION))
        self.assertEqual((Phase.P3.colours.axisA, Phase.P3.colours.axisB), (LightColour.GO, LightColour.STOP))
        self.assertEqual((Phase.P4.colours.axisA, Phase.P4.colours.axisB), (LightColour.CAUTION, LightColour.STOP))

    def test_exactly_one_axis_active(self):
        for phase in Phase:
            colours = phase.colours
            active = [c for c in (colours.axisA, colours.axisB) if c in ACTIVE]
            self.assertEqual(len(active), 1, phase)
            self.assertIn(LightColour.STOP, (colours.axisA, colours.axisB))

    def test_dwell_kinds(self):
        self.assertEqual(Phase.P1.dwell_kind, DwellKind.STANDARD)
        self.assertEqual(Phase.P3.dwell_kind, DwellKind.STANDARD)
        self.assertEqual(Phase.P2.dwell_kind, DwellKind.CAUTION)
        self.assertEqual(Phase.P4.dwell_kind, DwellKind.CAUTION)

    def test_table_covers_every_phase(self):
        self.assertEqual(set(PHASE_TABLE), set(Phase))

if __name__ == '__main__':
    unittest.main()
