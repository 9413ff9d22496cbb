from punyidna import punycode
from punyidna.idna import *
from punyidna.utils import *

__version__ = "1.0.0.dev0"
