"""Events listed on a poster: venue, city and date."""

from poster_extractor.schemas.base import (
    SchemaDefinition,
    array_of,
    boolean,
    object_of,
    string,
)

EVENT = object_of(
    {
        "venue": string("The name of the venue where the event is happening"),
        "location": string("The name of the city where this is happening"),
        "date": string(
            "The date and time when the event is happening in ISO-8601 format. "
            "Determine year based on day of the week and date if year is not provided."
        ),
        "isUpcoming": boolean("Is this date in the future?"),
    }
)

EVENTS = SchemaDefinition(
    name="Events",
    fields={
        "events": array_of(EVENT),
    },
)
