"""Relay error taxonomy. None of these are fatal to the server process."""


class RelayError(Exception):
    """Base class for per-request relay errors"""
    pass


class AuthenticationFailure(RelayError):
    """Bad or missing signature, stale timestamp, malformed headers"""
    pass


class UpstreamLookupFailure(RelayError):
    """User name resolution failed"""
    pass


class UpstreamGenerationFailure(RelayError):
    """The LLM call failed or returned nothing usable"""
    pass


class DeliveryFailure(RelayError):
    """Posting the message back to Slack failed"""
    pass
