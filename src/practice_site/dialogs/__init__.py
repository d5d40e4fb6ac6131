"""
Native dialog handling behind a synchronous capability interface.
"""

from practice_site.dialogs.ports import DialogPort, ScriptedDialogPort
from practice_site.dialogs.trigger import DialogTrigger

__all__ = [
    "DialogPort",
    "DialogTrigger",
    "ScriptedDialogPort",
]
