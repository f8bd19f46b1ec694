import logging
from contextlib import asynccontextmanager
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from gravityballs.config import SimulationConfig, autostart_enabled, configure_logging
from gravityballs.loop import SimulationLoop
from gravityballs.physics import FORM_DEFAULTS, body_from_form, build_simulation
from gravityballs.render import CommandSurface

logger = logging.getLogger(__name__)


class AddBodyRequest(BaseModel):
    position: str = FORM_DEFAULTS["position"]
    velocity: str = FORM_DEFAULTS["velocity"]
    mass: float = FORM_DEFAULTS["mass"]
    radius: float = FORM_DEFAULTS["radius"]
    color: str = FORM_DEFAULTS["color"]
    name: str = FORM_DEFAULTS["name"]
    nameColor: str = FORM_DEFAULTS["nameColor"]


class BodyState(BaseModel):
    name: str
    position: List[float]
    velocity: List[float]
    mass: float
    radius: float
    color: str
    nameColor: str


class ClearResponse(BaseModel):
    cleared: int


class StepRequest(BaseModel):
    ticks: int = Field(default=1, ge=1, le=1000)


class StepResponse(BaseModel):
    tick: int
    interactions: int


class DrawCommand(BaseModel):
    op: Literal["clearRect", "fillStyle", "beginPath", "arc", "fill", "fillText"]
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    start: Optional[float] = None
    end: Optional[float] = None
    color: Optional[str] = None
    text: Optional[str] = None


class FrameResponse(BaseModel):
    frame: int
    width: int
    height: int
    commands: List[DrawCommand]


class LoopStatus(BaseModel):
    running: bool
    frame: int
    tick: int
    bodies: int
    updatesPerSecond: float


def create_app(
    config: Optional[SimulationConfig] = None,
    autostart: Optional[bool] = None,
) -> FastAPI:
    configure_logging()
    config = config or SimulationConfig.from_env()
    autostart = autostart_enabled() if autostart is None else autostart

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        simulation = build_simulation(config)
        loop = SimulationLoop(simulation, surface=CommandSurface())
        app.state.simulation = simulation
        app.state.loop = loop
        if autostart:
            loop.start()
        try:
            yield
        finally:
            await loop.stop()

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _loop_status(loop: SimulationLoop) -> LoopStatus:
        return LoopStatus(
            running=loop.running,
            frame=loop.frame,
            tick=loop.simulation.tick,
            bodies=len(loop.simulation),
            updatesPerSecond=loop.simulation.config.updates_per_second,
        )

    # Handlers are async so every mutation runs on the event loop thread,
    # the same thread the tick task runs on.
    @app.get("/api/bodies", response_model=List[BodyState])
    async def list_bodies(request: Request):
        return request.app.state.simulation.snapshot()

    @app.post("/api/bodies", response_model=BodyState, status_code=201)
    async def add_body(req: AddBodyRequest, request: Request):
        try:
            body = request.app.state.simulation.add_body(**body_from_form(req.model_dump()))
        except ValueError as exc:
            logger.info("Rejected body %r: %s", req.name, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return body.to_dict()

    @app.delete("/api/bodies", response_model=ClearResponse)
    async def clear_bodies(request: Request):
        return {"cleared": request.app.state.simulation.clear()}

    @app.post("/api/step", response_model=StepResponse)
    async def step(request: Request, req: Optional[StepRequest] = None):
        req = req or StepRequest()
        loop: SimulationLoop = request.app.state.loop
        interactions = 0
        for _ in range(req.ticks):
            interactions += loop.tick()
        return {"tick": loop.simulation.tick, "interactions": interactions}

    @app.get("/api/frame", response_model=FrameResponse, response_model_exclude_none=True)
    async def frame(request: Request):
        loop: SimulationLoop = request.app.state.loop
        return {
            "frame": loop.frame,
            "width": config.canvas_width,
            "height": config.canvas_height,
            "commands": loop.surface.commands,
        }

    @app.get("/api/loop", response_model=LoopStatus)
    async def loop_status(request: Request):
        return _loop_status(request.app.state.loop)

    @app.post("/api/loop/start", response_model=LoopStatus)
    async def start_loop(request: Request):
        loop: SimulationLoop = request.app.state.loop
        loop.start()
        return _loop_status(loop)

    @app.post("/api/loop/stop", response_model=LoopStatus)
    async def stop_loop(request: Request):
        loop: SimulationLoop = request.app.state.loop
        await loop.stop()
        return _loop_status(loop)

    return app


app = create_app()
