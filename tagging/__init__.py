from .environment import Environment
from .errors import *
from .methods import Method, split_params
from .parser import ParseResult, Parser
from .builder import ParserBuilder
