from .dialect import Dialect as Dialect
from .bool_occurrence import BoolOccurrence as BoolOccurrence
