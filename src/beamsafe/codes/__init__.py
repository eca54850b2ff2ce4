# Design code provisions
from .base_code import DesignCode
from .bs8110 import BS8110
