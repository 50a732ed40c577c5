"""AccountAction – account and site loading / synchronization."""

from __future__ import annotations

import dataclasses
from typing import Callable

from wooflux.actions.action import Action
from wooflux.kernel.types import Result
from wooflux.models import Account, Site


class AccountAction(Action):
    """Category for actions handled by the account store."""


@dataclasses.dataclass(frozen=True, kw_only=True)
class LoadAccount(AccountAction):
    user_id: int
    on_completion: Callable[[Account | None], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class SynchronizeAccount(AccountAction):
    on_completion: Callable[[Result[Account, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class SynchronizeSites(AccountAction):
    on_completion: Callable[[Result[None, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class LoadSite(AccountAction):
    site_id: int
    on_completion: Callable[[Site | None], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class LoadAndSynchronizeSiteIfNeeded(AccountAction):
    """Return the stored site, synchronizing the site list first when it is missing."""

    site_id: int
    on_completion: Callable[[Result[Site, Exception]], None]


__all__ = [
    "AccountAction",
    "LoadAccount",
    "LoadAndSynchronizeSiteIfNeeded",
    "LoadSite",
    "SynchronizeAccount",
    "SynchronizeSites",
]
