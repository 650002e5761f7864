# src/labor_smd/simulator/__init__.py

from labor_smd.simulator.shock_source import ShockSource
from labor_smd.simulator.synthetic_data_gen import ObservedData, SyntheticDataGenerator
from labor_smd.simulator.model_simulator import LaborSupplySimulator, SimulatedData
__all__ = [
    # random source
    "ShockSource",
    # data generators
    "ObservedData",
    "SyntheticDataGenerator",
    # model simulator
    "LaborSupplySimulator",
    "SimulatedData",
]
