"""
MPX Response Models

Pydantic envelopes for the identity and access responses. Decoding goes
through these models so a malformed body becomes a DecodeError instead of
an unchecked dict access.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .constants import EXCEPTION_KEY
from .errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ExceptionEnvelope(BaseModel):
    """Application-level failure reported inside a 2xx response"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    is_exception: Any = Field(True, alias="isException")
    description: Optional[str] = None
    title: Optional[str] = None
    response_code: Optional[int] = Field(None, alias="responseCode")
    correlation_id: Optional[str] = Field(None, alias="correlationId")


class SignInResult(BaseModel):
    """Body of signInResponse"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    token: str = Field(..., min_length=1)
    user_id: Optional[str] = Field(None, alias="userId")
    user_name: Optional[str] = Field(None, alias="userName")
    duration: Optional[int] = None
    idle_timeout: Optional[int] = Field(None, alias="idleTimeout")


class SignInResponse(BaseModel):
    """Identity sign-in envelope"""
    model_config = ConfigDict(populate_by_name=True)

    sign_in_response: SignInResult = Field(..., alias="signInResponse")


class SelfResponse(BaseModel):
    """Identity getSelf envelope"""
    model_config = ConfigDict(populate_by_name=True)

    get_self_response: Dict[str, Any] = Field(..., alias="getSelfResponse")


class RegistryResponse(BaseModel):
    """Registry resolveDomain envelope: service name -> base URL"""
    model_config = ConfigDict(populate_by_name=True)

    resolve_domain_response: Dict[str, str] = Field(..., alias="resolveDomainResponse")


class CountResponse(BaseModel):
    """Count query envelope"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    total_results: StrictInt = Field(..., alias="totalResults")


def is_exception_envelope(data: Dict[str, Any]) -> bool:
    """Presence of the indicator key marks a failure, whatever its value"""
    return EXCEPTION_KEY in data


def parse_envelope(model: Type[ModelT], data: Any) -> ModelT:
    """
    Validate a decoded JSON object against an envelope model

    Raises:
        DecodeError: If the object does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected {model.__name__} shape: {e.error_count()} error(s)") from e


__all__ = [
    "ExceptionEnvelope",
    "SignInResult",
    "SignInResponse",
    "SelfResponse",
    "RegistryResponse",
    "CountResponse",
    "is_exception_envelope",
    "parse_envelope",
]
