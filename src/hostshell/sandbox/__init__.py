"""
Execution and filesystem backends.
"""

from hostshell.sandbox._base import Sandbox
from hostshell.sandbox.files import LocalFiles
from hostshell.sandbox.local import LocalSandbox

__all__ = [
    "Sandbox",
    "LocalSandbox",
    "LocalFiles",
]
