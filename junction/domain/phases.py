"""The four phases of a two-axis junction and the fixed cycle between them.

    Phase  Axis-A   Axis-B   Dwell
    P1     Stop     Go       standard
    P2     Stop     Caution  caution
    P3     Go       Stop     standard
    P4     Caution  Stop     caution

Each phase owns its colour pair, the kind of dwell it holds for and its
successor; all three come from ``PHASE_TABLE`` rather than branching on
the current phase.
"""
from enum import Enum
from typing import Dict, NamedTuple

from junction.domain.models import Colours, DwellKind, LightColour

class Phase(str, Enum):
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"

    @property
    def colours(self) -> Colours:
        return PHASE_TABLE[self].colours

    @property
    def dwell_kind(self) -> DwellKind:
        return PHASE_TABLE[self].dwell_kind

    def successor(self) -> "Phase":
        return PHASE_TABLE[self].successor

class PhaseRule(NamedTuple):
    colours: Colours
    dwell_kind: DwellKind
    successor: Phase

PHASE_TABLE: Dict[Phase, PhaseRule] = {
    Phase.P1: PhaseRule(Colours(axisA=LightColour.STOP, axisB=LightColour.GO), DwellKind.STANDARD, Phase.P2),
    Phase.P2: PhaseRule(Colours(axisA=LightColour.STOP, axisB=LightColour.CAUTION), DwellKind.CAUTION, Phase.P3),
    Phase.P3: PhaseRule(Colours(axisA=LightColour.GO, axisB=LightColour.STOP), DwellKind.STANDARD, Phase.P4),
    Phase.P4: PhaseRule(Colours(axisA=LightColour.CAUTION, axisB=LightColour.STOP), DwellKind.CAUTION, Phase.P1),
}

INITIAL_PHASE = Phase.P1
