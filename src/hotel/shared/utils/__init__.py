from .http_response import api_response as api_response
from .http_response import domain_error_response as domain_error_response
from .http_response import internal_error_response as internal_error_response
from .http_response import validation_error_response as validation_error_response
from .identity import Caller as Caller
from .identity import caller_from_event as caller_from_event
from .request import parse_body as parse_body
from .request import path_parameter as path_parameter
from .request import require_user_id as require_user_id
from .schema import RequestModel as RequestModel
from .schema import ResponseModel as ResponseModel
from .validators import to_decimal as to_decimal
