"""
Kitchen app services layer.

Every status change of a kitchen list goes through these functions; views
only translate their exceptions to HTTP responses.
"""

from .exceptions import (
    KitchenServiceError,
    KitchenListNotFoundError,
    InvalidKitchenListError,
    EmptyKitchenListError,
    InvalidListTransitionError,
    NotListOwnerError,
    InsufficientPermissionsError,
)

from .list_workflow import (
    submit_list,
    approve_list,
    reject_list,
    hide_list,
    delete_list,
    get_own_lists,
    get_recent_lists,
    get_pending_lists,
)

from .stock_levels import stock_level

__all__ = [
    # Exceptions
    'KitchenServiceError',
    'KitchenListNotFoundError',
    'InvalidKitchenListError',
    'EmptyKitchenListError',
    'InvalidListTransitionError',
    'NotListOwnerError',
    'InsufficientPermissionsError',
    # Workflow
    'submit_list',
    'approve_list',
    'reject_list',
    'hide_list',
    'delete_list',
    # Queries
    'get_own_lists',
    'get_recent_lists',
    'get_pending_lists',
    # Presentation
    'stock_level',
]
