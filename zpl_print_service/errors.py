"""
Dispatch Errors
===============

Every failure of a single dispatch attempt is terminal; nothing here is
retried. ``reason`` is the machine-readable code reported in result dicts.
"""


class PrintDispatchError(Exception):
    """Base class for dispatch failures."""

    reason = 'dispatch_failed'

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        data = {'success': False, 'reason': self.reason, 'error': self.message}
        data.update(self.details)
        return data


class DeliveryError(PrintDispatchError):
    """Connection refused, unresolved host, timeout or write failure."""

    reason = 'delivery_failed'


class ServiceResolutionError(PrintDispatchError):
    """The service name did not resolve to exactly one print service."""

    reason = 'service_resolution_failed'


class ServiceNotFoundError(ServiceResolutionError):
    reason = 'service_not_found'


class AmbiguousServiceError(ServiceResolutionError):
    reason = 'ambiguous_service'


class JobSubmissionError(PrintDispatchError):
    """The spooler rejected the job."""

    reason = 'job_submission_failed'


class RegistryUnavailableError(PrintDispatchError):
    """No OS print-service registry could be reached."""

    reason = 'registry_unavailable'
