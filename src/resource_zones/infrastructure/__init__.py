"""Zone infrastructure: drivers and codecs."""

from .drivers import *
from .serializers import *

from . import drivers, serializers

__all__ = drivers.__all__ + serializers.__all__
