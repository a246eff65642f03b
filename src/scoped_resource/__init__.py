from scoped_resource.exceptions import (
    ScopedResourceArityError,
    ScopedResourceCopyError,
    ScopedResourceError,
    ScopedResourceMisuseError,
)
from scoped_resource.factories import make_scoped_resource, make_scoped_resource_checked
from scoped_resource.resource import ResourceSlot, ScopedResource
from scoped_resource.scope import ResourceScope
from scoped_resource.settings import ScopedResourceSettings, get_settings
from scoped_resource.strategy import InvokeStrategy

__all__ = [
    "InvokeStrategy",
    "ResourceScope",
    "ResourceSlot",
    "ScopedResource",
    "ScopedResourceArityError",
    "ScopedResourceCopyError",
    "ScopedResourceError",
    "ScopedResourceMisuseError",
    "ScopedResourceSettings",
    "get_settings",
    "make_scoped_resource",
    "make_scoped_resource_checked",
]
