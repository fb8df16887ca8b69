"""Reserved literals shared by every producer and consumer of topology IDs."""

from __future__ import annotations

# Node IDs are compared byte for byte across probes and the app, so these
# values are part of the wire format. Changing any of them invalidates every
# report already in flight.

# ScopeDelim separates the contextual scopes inside a single node ID. The key
# structure differs per topology.
SCOPE_DELIM = ";"

# EdgeDelim separates two complete node IDs that share one key.
EDGE_DELIM = "|"

HOST_MARKER = "<host>"
PSEUDO_PREFIX = "pseudo"
ADJACENCY_PREFIX = ">"

# Node ID used to represent any remote IP.
THE_INTERNET = "theinternet"

RESERVED_CHARACTERS = frozenset({SCOPE_DELIM, EDGE_DELIM})
