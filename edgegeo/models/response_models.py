from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class GeolocationResult(BaseModel):
    """Where the current request appears to originate, as reported by the edge network.

    Every field is optional: outside the edge network (e.g. local development)
    all of them are null.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    ip: str | None = Field(default=None, examples=["203.0.113.42"])
    city: str | None = Field(default=None, examples=["San Francisco"])
    country: str | None = Field(default=None, description="ISO 3166-1 alpha-2 code.", examples=["US"])
    country_region: str | None = Field(default=None, description="ISO 3166-2 subdivision code.", examples=["CA"])
    continent: str | None = Field(default=None, examples=["NA"])
    latitude: str | None = Field(default=None, examples=["37.7749"])
    longitude: str | None = Field(default=None, examples=["-122.4194"])
    timezone: str | None = Field(default=None, description="IANA timezone identifier.", examples=["America/Los_Angeles"])
    postal_code: str | None = Field(default=None, examples=["94102"])
    region: str | None = Field(
        default=None,
        description="Identifier of the edge node that served the request.",
        examples=["sfo1"],
    )
