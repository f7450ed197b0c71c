"""
API v1 routes.

Defines REST endpoints for user and product intake. Each endpoint decodes
its transport format into a record, asks the intake service for a
verdict, and translates the verdict into a response.
"""

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from src.api.dependencies import get_intake_service
from src.api.models import EndpointResponse, ProductCreated, ProductRequest
from src.domain.intake import IntakeService
from src.domain.records import Product, User
from src.domain.verdict import Invalid

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

_FORM_INT = re.compile(r"[+-]?[0-9]+")


def envelope_response(response: EndpointResponse) -> JSONResponse:
    """Send an envelope; any code other than 200 is sent as 400 Bad Request."""
    status_code = status.HTTP_200_OK if response.code == 200 else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def parse_form_int(raw: str) -> int:
    """Parse a form integer; anything but optionally signed ASCII digits becomes 0."""
    if not _FORM_INT.fullmatch(raw):
        return 0
    return int(raw)


@router.get(
    "/user/{user_id}",
    response_class=PlainTextResponse,
    summary="Echo a user ID",
)
async def get_user(user_id: str) -> str:
    """Return the requested user ID as plain text."""
    return f"User ID: {user_id}"


@router.post(
    "/user",
    response_class=PlainTextResponse,
    responses={400: {"description": "Constraint violation (plain-text reason)"}},
    summary="Create a user",
    description="Submit a form-encoded user. The first violated constraint "
    "is returned as plain text with status 400.",
)
async def create_user(
    name: Annotated[str, Form()] = "",
    age: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    service: IntakeService = Depends(get_intake_service),
) -> PlainTextResponse:
    """
    Create a user from form fields.

    - **name**: 3-10 characters
    - **age**: 25-50 (non-numeric values count as missing)
    - **email**: 10-100 characters
    - **password**: 3-10 characters
    """
    logger.info("User submission received: name=%s", name)

    user = User(name=name, age=parse_form_int(age), email=email, password=password)
    verdict = service.check("User", user)
    if isinstance(verdict, Invalid):
        logger.warning("User rejected: %s", verdict.message)
        return PlainTextResponse(verdict.message, status_code=status.HTTP_400_BAD_REQUEST)

    return PlainTextResponse("User created successfully")


@router.post(
    "/product",
    response_model=EndpointResponse,
    responses={
        400: {"model": EndpointResponse, "description": "Invalid JSON or constraint violation"},
    },
    summary="Create a product",
    description="Submit a JSON product. Responses use the {code, msg, data} envelope.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ProductRequest.model_json_schema()}},
        }
    },
)
async def create_product(
    request: Request,
    service: IntakeService = Depends(get_intake_service),
) -> JSONResponse:
    """
    Create a product from a JSON body.

    Returns the product name and price on success.
    """
    try:
        payload = ProductRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning("JSON decoding error: %s", e)
        return envelope_response(EndpointResponse(code=400, msg="Invalid JSON"))

    product = Product(name=payload.name, price=payload.price, stock=payload.stock)
    verdict = service.check("Product", product)
    if isinstance(verdict, Invalid):
        logger.warning("Validation error: %s", verdict.message)
        return envelope_response(EndpointResponse(code=400, msg=verdict.message))

    return envelope_response(
        EndpointResponse(
            code=200,
            msg="Product created successfully",
            data=ProductCreated(name=product.name, price=product.price).model_dump(),
        )
    )
