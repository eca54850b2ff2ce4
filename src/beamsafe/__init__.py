"""BeamSafe - preliminary sizing of residential RC beams, columns and footings."""

from loguru import logger

from beamsafe.codes import BS8110, DesignCode
from beamsafe.core import DesignEngine, run_design
from beamsafe.models import DesignInput, DesignResult, DesignStatus

__version__ = "0.4.0"

# Library code stays silent unless an application enables it.
logger.disable("beamsafe")
