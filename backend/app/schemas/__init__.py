# app/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .user import *
from .auth import *
from .post import *
from .file import *
from .error import *
