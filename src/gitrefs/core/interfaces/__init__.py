from .git import LsRemoteProtocol, RefListerProtocol

__all__ = [
    'LsRemoteProtocol',
    'RefListerProtocol',
]
