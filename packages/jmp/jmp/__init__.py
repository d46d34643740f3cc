"""jmp - fixed-timestep simulation core for a small physics arcade game."""

from jmp.config import SimulationConfig
from jmp.contact import EntityContactListener, EntityRegistry
from jmp.entity import Entity
from jmp.simulation import Simulation
from jmp.suspend import SuspendController
from jmp.timer import STEP_TOLERANCE, Timer
from jmp.types import Body, Contact, PhysicsWorld, Screen, Steppable, SuspendError

__all__ = [
    "STEP_TOLERANCE",
    "Body",
    "Contact",
    "Entity",
    "EntityContactListener",
    "EntityRegistry",
    "PhysicsWorld",
    "Screen",
    "Simulation",
    "SimulationConfig",
    "Steppable",
    "SuspendController",
    "SuspendError",
    "Timer",
]
