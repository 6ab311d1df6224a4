import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from junction.domain import config
from junction.domain.models import ControllerStatus
from junction.kernel.signal_controller import SignalController

controller: SignalController = None

def build_controller() -> SignalController:
    """Controller configured from the environment, defaults otherwise."""
    standard = os.environ.get(config.STANDARD_DWELL_ENV)
    caution = os.environ.get(config.CAUTION_DWELL_ENV)
    try:
        standard = float(standard) if standard is not None else None
        caution = float(caution) if caution is not None else None
    except ValueError:
        # Let the controller reject it with its own error
        pass
    return SignalController(standard, caution)

@asynccontextmanager
async def lifespan(app: FastAPI):
    global controller
    controller = build_controller()
    yield
    # Shutdown
    controller.stop()

app = FastAPI(lifespan=lifespan)

@app.get("/api/signal", response_model=ControllerStatus)
async def get_signal_state():
    """Returns the current phase, colours and elapsed time of the junction"""
    return controller.status()

@app.post("/api/signal/start", response_model=ControllerStatus)
async def start_signal():
    """Starts (or resumes) the autonomous phase cycle"""
    if controller.running:
        raise HTTPException(status_code=409, detail="Controller already running")
    controller.start()
    return controller.status()

@app.post("/api/signal/stop", response_model=ControllerStatus)
async def stop_signal():
    """Cancels the pending transition"""
    controller.stop()
    return controller.status()

@app.get("/")
def read_root():
    return {"status": "Junction Signal Controller Running"}
