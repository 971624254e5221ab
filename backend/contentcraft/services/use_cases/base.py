"""
Base use case class.

Each use case is one business operation, independent of HTTP. Routes build
a request object, call execute(), and translate raised domain exceptions
into HTTP responses.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            Domain exceptions (ValidationError, NotFoundError, ...). HTTP
            exceptions are the route's responsibility.
        """
        pass
