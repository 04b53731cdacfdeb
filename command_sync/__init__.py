"""
Command Sync
Reconciles locally defined Discord application commands with the remote registry.
"""

__version__ = "0.1.0"
__package_name__ = "command-sync"
