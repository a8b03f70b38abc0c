"""
FastAPI backend: contact list REST API under /api, docs at /docs and /openapi.json.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Path, Request, status

from api.config import configure_logging, load_settings
from api.errors import INVALID_REQUEST, NOT_FOUND, register_error_handlers
from api.schemas import (
    ContactBody,
    ContactItem,
    ContactListResponse,
    ContactResponse,
    MessageResponse,
)
from contactbook.application import (
    ContactData,
    ContactNotFound,
    ContactRepository,
    ContactService,
)
from contactbook.infrastructure import InMemoryContactRepository

logger = logging.getLogger(__name__)

API_TITLE = "Contact API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Contact API project. Developed using FastAPI and pydantic."

# Optional minus sign and ASCII digits only; int() alone would also accept "1_0" and " 1".
# The path param is declared str so this check owns parse failures; docs still show an integer.
_CONTACT_ID_RE = re.compile(r"-?[0-9]+")

_BAD_REQUEST = {
    "model": MessageResponse,
    "description": "Bad Request",
    "content": {"application/json": {"example": {"success": False, "message": INVALID_REQUEST}}},
}
_NOT_FOUND = {
    "model": MessageResponse,
    "description": "Not Found",
    "content": {"application/json": {"example": {"success": False, "message": NOT_FOUND}}},
}


def parse_contact_id(raw: str) -> int:
    """Parse a path segment into a contact id. Raises 400 Invalid request if it is not an integer."""
    if not _CONTACT_ID_RE.fullmatch(raw or ""):
        logger.warning("Invalid contact id %r", raw)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_REQUEST)
    return int(raw)


def get_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def _not_found(contact_id: int) -> HTTPException:
    logger.info("Contact %s not found", contact_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


# --- REST: contacts ---

router = APIRouter(prefix="/api", tags=["Contacts"])


@router.get(
    "/contacts",
    response_model=ContactListResponse,
    summary="Get contacts",
    description="Get all contacts in creation order",
)
def list_contacts(service: ContactService = Depends(get_service)):
    contacts = service.list_contacts()
    return ContactListResponse(
        success=True, data=[ContactItem.from_contact(c) for c in contacts]
    )


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactResponse,
    summary="Get contact by ID",
    description="Get one contact by ID",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
def get_contact(
    contact_id: str = Path(
        ..., description="Contact ID", examples=[1], json_schema_extra={"type": "integer"}
    ),
    service: ContactService = Depends(get_service),
):
    cid = parse_contact_id(contact_id)
    contact = service.get_contact(cid)
    if contact is None:
        raise _not_found(cid)
    return ContactResponse(success=True, data=ContactItem.from_contact(contact))


@router.post(
    "/contacts",
    response_model=MessageResponse,
    summary="Add contact",
    description="Add a contact. The id is assigned by the server",
    responses={400: _BAD_REQUEST},
)
def create_contact(
    body: ContactBody,
    service: ContactService = Depends(get_service),
):
    added = service.add_contact(ContactData(name=body.name, email=body.email))
    logger.info("Contact %s added", added.contact_id)
    return MessageResponse(success=True, message=f"Contact {added.contact_id} added")


@router.put(
    "/contacts/{contact_id}",
    response_model=MessageResponse,
    summary="Update contact",
    description="Replace name and email of a contact. Id and list position are kept",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
def update_contact(
    body: ContactBody,
    contact_id: str = Path(
        ..., description="Contact ID", examples=[1], json_schema_extra={"type": "integer"}
    ),
    service: ContactService = Depends(get_service),
):
    cid = parse_contact_id(contact_id)
    result = service.update_contact(cid, ContactData(name=body.name, email=body.email))
    if isinstance(result, ContactNotFound):
        raise _not_found(cid)
    logger.info("Contact %s updated", cid)
    return MessageResponse(success=True, message=f"Contact {cid} updated")


@router.delete(
    "/contacts/{contact_id}",
    response_model=MessageResponse,
    summary="Remove contact",
    description="Remove a contact. Its id is never reused",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
def remove_contact(
    contact_id: str = Path(
        ..., description="Contact ID", examples=[1], json_schema_extra={"type": "integer"}
    ),
    service: ContactService = Depends(get_service),
):
    cid = parse_contact_id(contact_id)
    result = service.remove_contact(cid)
    if isinstance(result, ContactNotFound):
        raise _not_found(cid)
    logger.info("Contact %s removed", cid)
    return MessageResponse(success=True, message=f"Contact {cid} removed")


# --- App ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Contact API: REST under /api, docs at /docs")
    yield
    logger.info(
        "Contact API shutting down with %s contact(s) in memory",
        app.state.contact_repository.count(),
    )


def create_app(repository: ContactRepository | None = None) -> FastAPI:
    """Build the app with its own contact store. Each call starts from an empty store unless one is given."""
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        lifespan=lifespan,
    )
    if repository is None:
        repository = InMemoryContactRepository()
    app.state.contact_repository = repository
    app.state.contact_service = ContactService(repository)
    register_error_handlers(app)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    app.include_router(router)
    return app


app = create_app()
