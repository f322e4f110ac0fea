"""
Chain of Responsibility (Behavioral), functional flavour

Intent:
    Pass a request along a chain of handlers; the first handler that produces
    a response wins and the rest of the chain is never consulted.

Participants:
    - Handler (abstract): declares `handle` and knows how to combine itself
      with "the rest of the chain" (`combine_with`).
    - ConcreteHandler: returns a Response when responsible, None to defer.
    - Client: folds the handlers into one callable with `build_chain`.

Notes:
    - Handlers hold no `next` reference; the chain is pure function composition.
    - "No response" is `None`; no exceptions are used for control flow.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from behavioral.chain_of_responsibility.functional_chain import build_chain

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Request:
    """Immutable request passed through the handler chain.

    :ivar user: Name of the requesting user.
    :ivar data: Payload to be processed.
    """
    user: str
    data: str


@dataclass(frozen=True, slots=True)
class Response:
    """Immutable outcome produced by the handler that took responsibility.

    :ivar message: Short human-readable description.
    """
    message: str


RequestHandler = Callable[[Request], Optional[Response]]


class Handler(ABC):
    """Abstract handler defining the composition protocol.

    Handlers only implement their responsibility in `handle`; delegation is
    provided by `combine_with`.
    """

    @abstractmethod
    def handle(self, request: Request) -> Optional[Response]:
        """Process the request or defer.

        :param request: The incoming request.
        :return: A Response if handled here; None to let the chain continue.
        """
        raise NotImplementedError

    def combine_with(self, nxt: RequestHandler) -> RequestHandler:
        """Compose this handler in front of the rest of the chain.

        :param nxt: The already-built remainder of the chain.
        :return: Handler returning this handler's response, or `nxt`'s when it defers.
        """
        def handle_or_delegate(request: Request) -> Optional[Response]:
            response = self.handle(request)
            if response is not None:
                return response
            return nxt(request)
        return handle_or_delegate

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LoggerHandler(Handler):
    """Echoes every request to the console and always defers."""

    def handle(self, request: Request) -> Optional[Response]:
        print(f"Logging request: {request.data}")
        return None


class AuthHandler(Handler):
    """Rejects anyone but the admin user; authorised requests are passed on."""

    ADMIN_USER = "admin"

    def handle(self, request: Request) -> Optional[Response]:
        """
        :param request: The incoming request.
        :return: "Unauthorized!" response for non-admin users; None otherwise.
        """
        if request.user != self.ADMIN_USER:
            logger.debug("Rejected request from user %r", request.user)
            return Response("Unauthorized!")
        return None


class BusinessLogicHandler(Handler):
    """Processes the request payload; never defers."""

    def handle(self, request: Request) -> Optional[Response]:
        logger.debug("Processing request data %r", request.data)
        return Response(f"Processed: {request.data}")


def unhandled(request: Request) -> Optional[Response]:
    """Terminal handler: nobody took responsibility."""
    return None


def build_default_chain(handlers: Optional[Sequence[Handler]] = None) -> RequestHandler:
    """Build a chain (Logger → Auth → BusinessLogic by default).

    :param handlers: Handlers in evaluation order; defaults to the canonical three.
    :return: A single callable representing the whole chain.
    """
    if handlers is None:
        handlers = (LoggerHandler(), AuthHandler(), BusinessLogicHandler())
    return build_chain([h.combine_with for h in handlers], unhandled)


def main() -> None:
    chain = build_default_chain()
    response = chain(Request("admin", "data"))
    if response is not None:
        print(f"Response: {response.message}")
    else:
        print("Request was not handled")


__all__ = [
    "Request",
    "Response",
    "RequestHandler",
    "Handler",
    "LoggerHandler",
    "AuthHandler",
    "BusinessLogicHandler",
    "unhandled",
    "build_default_chain",
    "main",
]


if __name__ == "__main__":
    main()
