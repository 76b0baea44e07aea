"""Bearer-token authentication for the JSON API."""
import datetime
import logging
from functools import wraps

from django.conf import settings
from django.contrib.auth import get_user_model
from jose import JWTError, jwt

from .exceptions import Unauthorized

logger = logging.getLogger(__name__)


def create_access_token(user, expires_delta=None):
    expire = datetime.datetime.now(datetime.timezone.utc) + (expires_delta or datetime.timedelta(minutes=settings.JWT_ACCESS_TOKEN_MINUTES))
    payload = {'sub': str(user.pk), 'username': user.get_username(), 'exp': expire}
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token):
    """Return the active user a token was issued to, or raise Unauthorized."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise Unauthorized('Invalid token')

    user_id = payload.get('sub')
    if user_id is None:
        raise Unauthorized('Invalid token')

    User = get_user_model()
    try:
        user = User.objects.get(pk=user_id)
    except (User.DoesNotExist, ValueError):
        raise Unauthorized('Invalid token')
    if not user.is_active:
        raise Unauthorized('User is inactive')
    return user


def token_required(view_func):
    """Resolve ``Authorization: Bearer <token>`` into request.user before the view runs."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        header = request.headers.get('Authorization', '')
        scheme, _, token = header.partition(' ')
        if scheme.lower() != 'bearer' or not token.strip():
            raise Unauthorized('Missing bearer token')
        request.user = decode_access_token(token.strip())
        return view_func(request, *args, **kwargs)
    return _wrapped
