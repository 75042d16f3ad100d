# dhl_wrapper/api/response_handler.py
# Author: dhl-wrapper

from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ResponseNotOkError, SerializationError
from .models import ResponseNotOk

if TYPE_CHECKING:
    from .client import APIResponse

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger(__name__)

class ResponseHandler:
    """
    Turns raw API responses into typed models or typed errors.

    The HTTP status decides which shape is expected:
    - non-2xx: the status/title/detail error body
    - 2xx: the endpoint's success model; a body that only fits the error
      shape is still reported as ResponseNotOkError
    """

    def process_response(self, response: "APIResponse", response_model: Type[T]) -> T:
        """
        Parse a response into its success model

        Args:
            response: Raw response returned by the transport
            response_model: Pydantic model of the endpoint's success body

        Returns:
            Instance of response_model

        Raises:
            ResponseNotOkError: The API reported a failure
            SerializationError: The body fits neither shape
        """
        if not response.ok:
            raise self.extract_error(response)

        try:
            return response_model.model_validate_json(response.body)
        except ValidationError as e:
            error = self.parse_error_body(response.body)
            if error is not None:
                raise ResponseNotOkError(
                    error.status,
                    error.title,
                    error.detail,
                    details=self._response_details(response)
                ) from e
            logger.warning(
                f"Response body does not match {response_model.__name__}: {e.error_count()} error(s)",
                extra={"endpoint": response.url}
            )
            raise SerializationError(
                f"Failed to parse response as {response_model.__name__}: {str(e)}",
                details=self._response_details(response)
            ) from e

    def extract_error(self, response: "APIResponse") -> ResponseNotOkError:
        """
        Build the error for a failed response

        Falls back to the HTTP status line when the body is not DHL's error shape.
        """
        details = self._response_details(response)
        error = self.parse_error_body(response.body)
        if error is not None:
            return ResponseNotOkError(error.status, error.title, error.detail, details=details)

        return ResponseNotOkError(
            response.status,
            response.reason or "",
            response.text(),
            details=details
        )

    @staticmethod
    def parse_error_body(body: bytes) -> Optional[ResponseNotOk]:
        try:
            return ResponseNotOk.model_validate_json(body)
        except ValidationError:
            return None

    @staticmethod
    def _response_details(response: "APIResponse") -> Dict[str, Any]:
        return {
            "http_status": response.status,
            "url": response.url,
        }
