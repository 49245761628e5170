"""Client library for the NationStates API.
See https://www.nationstates.net/pages/api.html for NS API details.
"""

from nationscripts.core import *
from nationscripts.exceptions import *
from nationscripts.enums import *
from nationscripts.auth import *
from nationscripts.ratelimit import *
from nationscripts.parser import *
from nationscripts.models import *
from nationscripts.responses import *
from nationscripts.request import *
from nationscripts.commands import *
from nationscripts.api import *
