"""UDP Multi Sender: send UDP datagrams to many ports and watch for replies."""

__version__ = "1.0.0"
