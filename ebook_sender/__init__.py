"""Application package root.

Hosts the "view ebook" page of the ebook sender and the client selection
controller that gates sending an ebook to a group of clients. Page and
route code lives under `routes`; the selection state machine lives under
`services` and has no Flask dependency so it can be driven headlessly.
"""

__all__ = [
]
