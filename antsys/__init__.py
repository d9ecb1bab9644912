from .errors import InvalidDimension, IoFailure
from .colony import ACOConfig, ColonyState
from .ant_system import AntSystem, path_cost
from .trace import TextTraceWriter, TraceRecorder
from .labels import city_label, display_path
from .tsp import ATSPInstance
from .experiments import run_rounds, save_rounds_csv
