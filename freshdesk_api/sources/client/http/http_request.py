import json
from pathlib import Path
from typing import IO, Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator  # type: ignore

ATTACHMENTS_FIELD = "attachments"
DEFAULT_ATTACHMENT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_ATTACHMENT_FILENAME = "attachment"

# (form key, value) for plain fields, (form key, (filename, content, content type)) for files
FormField = Tuple[str, str]
FilePart = Tuple[str, Tuple[str, bytes, str]]


class Attachment(BaseModel):
    """A file sent as a multipart part

    Args:
        filename: Name reported to Freshdesk
        content: Raw bytes or a path to read the bytes from
        content_type: MIME type of the part
    """
    model_config = ConfigDict(frozen=True)

    filename: str
    content: Union[bytes, Path]
    content_type: str = DEFAULT_ATTACHMENT_CONTENT_TYPE

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "Attachment":
        """Build an attachment that is read from disk when the request is encoded"""
        path = Path(path)
        return cls(
            filename=path.name,
            content=path,
            content_type=content_type or DEFAULT_ATTACHMENT_CONTENT_TYPE,
        )

    @classmethod
    def from_file(cls, fileobj: IO[bytes], content_type: Optional[str] = None) -> "Attachment":
        """Build an attachment from an open binary file, read immediately"""
        content = fileobj.read()
        if isinstance(content, str):
            content = content.encode()
        name = getattr(fileobj, "name", None)
        filename = Path(name).name if isinstance(name, (str, Path)) else DEFAULT_ATTACHMENT_FILENAME
        return cls(
            filename=filename,
            content=content,
            content_type=content_type or DEFAULT_ATTACHMENT_CONTENT_TYPE,
        )

    def read(self) -> bytes:
        if isinstance(self.content, Path):
            return self.content.read_bytes()
        return self.content


class JsonBody(BaseModel):
    """Request body serialized as JSON text"""
    model_config = ConfigDict(frozen=True)

    payload: Any

    def serialize(self) -> str:
        return json.dumps(self.payload)


class MultipartBody(BaseModel):
    """Request body encoded as multipart/form-data

    List fields are sent under a '[]'-suffixed key with one part per element,
    nested mappings are flattened to 'key[sub]'. Attachments are sent as file
    parts under 'attachments[]'.
    """
    model_config = ConfigDict(frozen=True)

    fields: Dict[str, Any] = Field(default_factory=dict)
    attachments: List[Attachment] = Field(min_length=1)

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if ATTACHMENTS_FIELD in v:
            raise ValueError("attachments must be passed through the 'attachments' argument")
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Union["MultipartBody", JsonBody]:
        """Choose the body variant for a plain mapping

        A mapping whose 'attachments' key holds a non-empty list becomes a
        multipart body; anything else is sent as JSON.
        """
        attachments = data.get(ATTACHMENTS_FIELD)
        if not isinstance(attachments, list) or not attachments:
            return JsonBody(payload=dict(data))
        fields = {key: value for key, value in data.items() if key != ATTACHMENTS_FIELD}
        return cls(
            fields=fields,
            attachments=[_as_attachment(item) for item in attachments],
        )

    def form_fields(self) -> List[FormField]:
        """Plain form fields in insertion order"""
        result: List[FormField] = []
        for key, value in self.fields.items():
            _append_field(result, key, value)
        return result

    def file_parts(self) -> List[FilePart]:
        return [
            (f"{ATTACHMENTS_FIELD}[]", (attachment.filename, attachment.read(), attachment.content_type))
            for attachment in self.attachments
        ]


RequestBody = Union[JsonBody, MultipartBody]


def _as_attachment(item: Any) -> Attachment:
    if isinstance(item, Attachment):
        return item
    if isinstance(item, (str, Path)):
        return Attachment.from_path(item)
    if hasattr(item, "read"):
        return Attachment.from_file(item)
    raise TypeError(f"Unsupported attachment type: {type(item).__name__}")


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append_field(result: List[FormField], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _append_field(result, f"{key}[]", item)
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _append_field(result, f"{key}[{sub_key}]", sub_value)
    else:
        result.append((key, _form_value(value)))


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The body of the request (JSON or multipart variant)
        query_params: The query parameters to use (scalars are sent as strings)
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[RequestBody] = None
    query_params: Dict[str, str] = Field(default_factory=dict, alias="query")

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        return v.upper()

    @field_validator("query_params", mode="before")
    @classmethod
    def validate_query_params(cls, v: Any) -> Any:
        """Render scalar values as strings; None values are dropped"""
        if not isinstance(v, Mapping):
            return v
        return {str(key): _form_value(value) for key, value in v.items() if value is not None}

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Attachments are represented by their filename, the Authorization
        header is masked.
        """
        data = self.model_dump(exclude={"body"})
        if "Authorization" in data["headers"]:
            data["headers"]["Authorization"] = "***"

        if isinstance(self.body, JsonBody):
            data["body"] = self.body.payload
        elif isinstance(self.body, MultipartBody):
            data["body"] = {
                "fields": self.body.fields,
                "attachments": [attachment.filename for attachment in self.body.attachments],
            }
        else:
            data["body"] = None

        return json.dumps(data, indent=2, default=str)
