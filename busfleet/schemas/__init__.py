# Schemas package (re-export feature modules for stable imports)
from .users.user import *
from .notifications.notification import *
from .push.push import *
from .common.common import *
