from .config import SweepConfig, us
from .errors import ArithmeticDegenerate, HoldingTimeError, InvalidConfiguration, SweepError
from .output import read_table, to_frame, write_table
from .phy import PhyOracle, TablePhyOracle, TxVector, WifiMode
from .sweep import run_sweep, sweep_points
from .timing import ExchangeTiming, SweepPoint, exchange_timing, to_slots

__version__ = "0.1.0"
