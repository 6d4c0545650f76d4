"""
gitrefs.adapters – Adapters that bridge concrete Git clients to Protocols.

Side-effectful network code lives here, behind the Protocols in
``gitrefs.core.interfaces``, so the resolution logic can be tested with fakes.

Modules
-------
ls_remote.py → DulwichLsRemote
"""

from .ls_remote import DulwichLsRemote

__all__ = [
    "DulwichLsRemote",
]
