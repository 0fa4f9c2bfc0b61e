"""Custom value classes for django-configurations."""

from configurations import values

from marketpay.schedules import parse_crontab


class CrontabValue(values.Value):
    """
    Class used to read a cron expression from environment variables.

    The expression is validated and converted to a celery crontab, so a
    malformed expression fails when the settings are loaded rather than when
    celery beat starts.
    """

    def to_python(self, value):
        """Convert the cron expression to a celery crontab."""
        try:
            return parse_crontab(value)
        except ValueError as err:
            raise ValueError(f"Cannot interpret cron expression {value!r}: {err}") from err

    def setup(self, name):
        """Convert the default value as well."""
        value = super().setup(name)
        if isinstance(value, str):
            value = self.to_python(value)
            self.value = value
        return value
