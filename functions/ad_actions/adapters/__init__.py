"""
Action group adapters. Each one turns an agent function call into backend
calls and answers with a response envelope.
"""

from .base import BaseAdapter
from .command import CommandExecutionAdapter
from .directory import DirectoryDataAdapter

__all__ = ["BaseAdapter", "CommandExecutionAdapter", "DirectoryDataAdapter"]
