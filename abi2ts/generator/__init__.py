"""abi2ts typings generator."""

from .builtins import BUILTINS as BUILTINS
from .builtins import Builtin as Builtin
from .builtins import lookup as lookup
from .errors import *
from .parser import load as load
from .parser import parse as parse
from .resolver import TypeResolver as TypeResolver
from .typescript import render as render
from .typescript import transform as transform
from .types import *
