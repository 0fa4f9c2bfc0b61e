"""Backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import LazyObject, cached_property
from django.utils.module_loading import import_string

from marketpay.exceptions import MarketpayInvalidBackendError


class BackendHandler:
    """Handler managing the instantiation of a backend declared in the settings."""

    def __init__(self, setting_name, backend=None):
        """Initialize the backend handler."""
        # backend is an optional dict of backend definitions
        # (structured like settings.MARKETPAY_OPERATOR).
        self.setting_name = setting_name
        self._backend = backend
        self._instance = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = getattr(settings, self.setting_name).copy()
            except AttributeError as e:
                raise ImproperlyConfigured(f"settings.{self.setting_name} is not configured") from e
        return self._backend

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._instance is None:
            self._instance = self.create_backend(self.backend)
        return self._instance

    def create_backend(self, params):
        """Instantiate and configure the backend."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise MarketpayInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)


class LazyBackend(LazyObject):
    """Lazy object resolving its backend through a handler on first access."""

    def __init__(self, handler):
        """Store the handler without triggering the backend setup."""
        self.__dict__["_handler"] = handler
        super().__init__()

    def _setup(self):
        """Configure the backend."""
        self._wrapped = self.__dict__["_handler"]()
