"""Request and response bodies for the contact routes. Every response is an envelope."""

from pydantic import BaseModel, ConfigDict, Field

from contactbook.domain import Contact

CONTACT_EXAMPLE = {"id": 1, "name": "Wahyu", "email": "wahyu@example.com"}


class ContactBody(BaseModel):
    """Body of create and update. Both fields are required strings."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Wahyu", "email": "wahyu@example.com"}}
    )

    name: str
    email: str


class ContactItem(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": CONTACT_EXAMPLE})

    id: int
    name: str
    email: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactItem":
        return cls(id=contact.id, name=contact.name, email=contact.email)


class ContactListResponse(BaseModel):
    success: bool = Field(default=True, examples=[True])
    data: list[ContactItem] = Field(examples=[[CONTACT_EXAMPLE]])


class ContactResponse(BaseModel):
    success: bool = Field(default=True, examples=[True])
    data: ContactItem


class MessageResponse(BaseModel):
    """Envelope carrying a message instead of data (mutations and failures)."""

    success: bool
    message: str = Field(examples=["Contact 1 added"])
