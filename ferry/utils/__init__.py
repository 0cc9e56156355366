from .paths import *
from .status import *
