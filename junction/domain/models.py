from enum import Enum
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field

from junction.domain import config

class LightColour(str, Enum):
    STOP = "Stop"
    CAUTION = "Caution"
    GO = "Go"

class DwellKind(str, Enum):
    STANDARD = "standard"
    CAUTION = "caution"

# Strict: "1000" and True are not durations
Dwell = Annotated[float, Field(gt=0, strict=True, allow_inf_nan=False)]

class DwellConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    standardDwell: Dwell = config.DEFAULT_STANDARD_DWELL_MS
    cautionDwell: Dwell = config.DEFAULT_CAUTION_DWELL_MS

    def for_kind(self, kind: DwellKind) -> float:
        if kind == DwellKind.CAUTION:
            return self.cautionDwell
        return self.standardDwell

class Colours(BaseModel):
    model_config = ConfigDict(frozen=True)

    axisA: LightColour
    axisB: LightColour

# Notification event

class SignalChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    elapsedTime: float  # seconds since start()
    colours: Colours

# API/Response Models

class ControllerStatus(BaseModel):
    phase: str
    colours: Colours
    elapsedTime: float
    running: bool
    standardDwell: float
    cautionDwell: float
    lastChange: Optional[SignalChange] = None
