from typing import Optional, Any


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class StorageError(InfrastructureError):
    """Raised when storage operations fail."""
    pass


class CloudError(InfrastructureError):
    """Raised when a CPI call fails."""
    pass


class VmNotFoundError(CloudError):
    """Raised when the VM to operate on no longer exists on the CPI."""
    def __init__(self, vm_cid: str, details: Optional[Any] = None):
        super().__init__(f"VM '{vm_cid}' not found", details)
        self.vm_cid = vm_cid


class CpiNotFoundError(InfrastructureError):
    """Raised when a CPI name is not part of the CPI config."""
    pass


class AvailabilityZoneNotFoundError(InfrastructureError):
    """Raised when an availability zone cannot be mapped to a CPI."""
    pass
