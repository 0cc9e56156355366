from .base import *
from .job import *
from .storage import *
from .runner import *
