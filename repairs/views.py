from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from django.contrib.auth import authenticate
from functools import wraps
import json
import logging

from . import services
from .auth import create_access_token, token_required
from .exceptions import RepairsError, Unauthorized, ValidationFailure
from .serializers import customer_to_dict, device_to_dict, device_type_to_dict

logger = logging.getLogger(__name__)


def api_view(view_func):
    """Turn RepairsError (and anything unexpected) into a JSON error response."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except RepairsError as e:
            if e.status_code >= 500:
                logger.exception(f"{request.method} {request.path} failed")
            body = {'status': 'error', 'message': e.message}
            if e.errors:
                body['errors'] = e.errors
            return JsonResponse(body, status=e.status_code)
        except Exception:
            logger.exception(f"{request.method} {request.path} failed")
            return JsonResponse({'status': 'error', 'message': 'Internal server error'}, status=500)
    return _wrapped


def _json_body(request):
    try:
        data = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        raise ValidationFailure('Request body must be valid JSON')
    if not isinstance(data, dict):
        raise ValidationFailure('Request body must be a JSON object')
    return data


# --- Auth ---

@csrf_exempt
@require_http_methods(['POST'])
@api_view
def login(request):
    data = _json_body(request)
    user = authenticate(request, username=data.get('username'), password=data.get('password'))
    if user is None:
        raise Unauthorized('Invalid username or password')
    return JsonResponse({'access_token': create_access_token(user), 'token_type': 'Bearer'})


# --- Customers ---

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_view
@token_required
def customer_collection(request):
    if request.method == 'POST':
        data = _json_body(request)
        customer = services.register_customer(data, devices=data.get('devices'), actor=request.user)
        # Re-read so the response carries the linked devices
        customer = services.get_customer(customer.customer_id)
        return JsonResponse(customer_to_dict(customer), status=201)

    customers = services.list_customers()
    return JsonResponse([customer_to_dict(c) for c in customers], safe=False)


@csrf_exempt
@require_http_methods(['GET', 'PUT', 'DELETE'])
@api_view
@token_required
def customer_detail(request, customer_id):
    if request.method == 'PUT':
        data = _json_body(request)
        customer = services.update_customer(customer_id, data, devices=data.get('devices'), actor=request.user)
        return JsonResponse(customer_to_dict(customer))

    if request.method == 'DELETE':
        services.delete_customer(customer_id)
        return JsonResponse({'message': 'Customer deleted successfully'})

    return JsonResponse(customer_to_dict(services.get_customer(customer_id)))


# --- Devices ---

@require_http_methods(['GET'])
@api_view
@token_required
def device_list(request):
    return JsonResponse([device_to_dict(d) for d in services.list_devices()], safe=False)


@require_http_methods(['GET'])
@api_view
@token_required
def device_type_list(request):
    return JsonResponse([device_type_to_dict(dt) for dt in services.list_device_types()], safe=False)


@require_http_methods(['GET'])
@api_view
@token_required
def device_by_serial(request, serial_number):
    return JsonResponse(device_to_dict(services.find_device_by_serial(serial_number)))


@require_http_methods(['GET'])
@api_view
@token_required
def device_detail(request, device_id):
    return JsonResponse(device_to_dict(services.get_device(device_id)))
