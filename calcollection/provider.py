"""
The calendar collection provider.

Handles the requests that are specific to calendar collections:
MKCALENDAR, and GET/HEAD when the client asks for text/calendar.  Anything
else about rendering a collection is delegated to a generic spooler
supplied by the server.
"""
import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import Optional
from typing import Union

from calcollection.config import ProviderConfig
from calcollection.lib import error
from calcollection.model import AccessContext
from calcollection.model import Collection
from calcollection.model import Item
from calcollection.model import ResourceKind
from calcollection.model import tickets_of
from calcollection.operations.base import CALENDAR_MEDIA_TYPE
from calcollection.operations.base import CollectionStore
from calcollection.operations.calendar_ops import assemble_calendar
from calcollection.operations.collection_ops import create_calendar_collection
from calcollection.operations.freebusy_ops import redact
from calcollection.operations.negotiation_ops import negotiate
from calcollection.operations.negotiation_ops import RenderMode
from calcollection.protocol.types import DAVMethod
from calcollection.protocol.types import DAVRequest
from calcollection.protocol.types import DAVResponse
from calcollection.protocol.xml_builders import build_error_body
from calcollection.protocol.xml_builders import build_multistatus_body
from calcollection.protocol.xml_parsers import parse_mkcalendar_body

log = logging.getLogger("calcollection")

Resource = Union[Collection, Item]
GenericSpooler = Callable[[DAVRequest, Resource, bool], DAVResponse]

XML_CONTENT_TYPE = 'application/xml; charset="utf-8"'
XML_BODY_TYPES = ("text/xml", "application/xml", "text/plain", "application/octet-stream")
ALLOWED_METHODS = (DAVMethod.MKCALENDAR, DAVMethod.GET, DAVMethod.HEAD)


class CalendarCollectionProvider:
    """
    Sans-I/O handler for calendar collection requests.

    Example:
        provider = CalendarCollectionProvider(store, spool_generic)

        # the server resolves the target and who is asking
        response = provider.handle(request, collection, AccessContext(ticket))

        # and writes the response out
        send(response.status, response.headers, response.body)
    """

    def __init__(
        self,
        store: CollectionStore,
        generic_spooler: GenericSpooler,
        config: Optional[ProviderConfig] = None,
    ) -> None:
        """
        Args:
            store: Persistence layer creating collections
            generic_spooler: Renders a resource the plain WebDAV way
            config: Provider settings, defaults if not given
        """
        self.store = store
        self.generic_spooler = generic_spooler
        self.config = config or ProviderConfig()

    def handle(
        self, request: DAVRequest, resource: Resource, context: AccessContext
    ) -> DAVResponse:
        """
        Dispatch request on its method, turning DAV errors into error responses.

        ConsistencyError is a bug on our side (or in the resource resolution)
        and is passed on to the caller.
        """
        try:
            if request.method == DAVMethod.MKCALENDAR:
                return self.mkcalendar(request, resource)
            if request.method == DAVMethod.GET:
                return self.spool(request, resource, context, with_entity=True)
            if request.method == DAVMethod.HEAD:
                return self.spool(request, resource, context, with_entity=False)
            raise error.MethodNotAllowedError(
                url=request.path, reason=f"{request.method.value} not supported"
            )
        except error.ConsistencyError:
            raise
        except error.DAVError as e:
            return self.error_response(e)

    def mkcalendar(self, request: DAVRequest, collection: Collection) -> DAVResponse:
        """
        Create the calendar collection targeted by request.

        Returns:
            201 with no-cache headers, or 207 listing the properties that
            could not be set

        Raises:
            DAVError subclasses when the body can't be parsed or the
            collection can't be created there
        """
        if not collection.kind.is_collection:
            ## an item already sits at the target path
            raise error.ExistsError(url=request.path)
        properties = self._mkcalendar_properties(request)
        outcome = create_calendar_collection(collection, properties, self.store)

        if not outcome.is_multistatus:
            return DAVResponse(
                status=201,
                headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
            )

        return DAVResponse(
            status=207,
            headers={"Content-Type": XML_CONTENT_TYPE},
            body=build_multistatus_body([outcome.result]),
        )

    def _mkcalendar_properties(self, request: DAVRequest) -> Dict[str, Any]:
        if not request.body:
            return {}
        content_type = request.get_header("Content-Type")
        if content_type:
            base_type = content_type.split(";")[0].strip().lower()
            if base_type not in XML_BODY_TYPES:
                raise error.UnsupportedMediaTypeError(
                    url=request.path, reason=f"can't handle {content_type}"
                )
        return parse_mkcalendar_body(request.body)

    def spool(
        self,
        request: DAVRequest,
        resource: Resource,
        context: AccessContext,
        with_entity: bool = True,
    ) -> DAVResponse:
        """
        Render resource, as text/calendar if the client asks for exactly that.
        """
        if negotiate(request.get_headers("Accept")) is RenderMode.RAW_CALENDAR:
            return self._write_content(resource, context, with_entity)
        return self.generic_spooler(request, resource, with_entity)

    def _write_content(
        self, resource: Resource, context: AccessContext, with_entity: bool
    ) -> DAVResponse:
        if resource.kind is not ResourceKind.CALENDAR_COLLECTION:
            url = resource.path if resource.kind.is_collection else resource.name
            raise error.IncompatibleResourceTypeError(url=url)

        calendar = assemble_calendar(resource, self.config.product_id)
        calendar = redact(calendar, context, tickets_of(resource))

        charset = self.config.default_charset
        try:
            body = calendar.to_ical().decode("utf-8").encode(charset)
        except UnicodeEncodeError as e:
            raise error.MalformedCalendarDataError(
                url=resource.path,
                reason=f"calendar data can't be represented in {charset}: {e}",
            ) from e
        log.debug(f"rendering {resource.path} as {CALENDAR_MEDIA_TYPE}")
        return DAVResponse(
            status=200,
            headers={
                "Content-Type": f"{CALENDAR_MEDIA_TYPE}; charset={charset}",
                "Content-Length": str(len(body)),
            },
            body=body if with_entity else b"",
        )

    def error_response(self, e: error.DAVError) -> DAVResponse:
        """
        The response reporting e to the client.

        Preconditions go into a DAV:error body, otherwise the reason is
        sent as plain text.
        """
        if e.status >= 500:
            log.error(f"{e.status} for request: {e}")
        else:
            log.warning(f"{e.status} for request: {e}")
        if e.precondition is not None:
            headers = {"Content-Type": XML_CONTENT_TYPE}
            body = build_error_body(e.precondition)
        else:
            headers = {"Content-Type": "text/plain; charset=utf-8"}
            body = e.reason.encode("utf-8")
        if isinstance(e, error.MethodNotAllowedError):
            headers["Allow"] = ", ".join(m.value for m in ALLOWED_METHODS)
        return DAVResponse(status=e.status, headers=headers, body=body)
