"""AccountStore – the signed-in account and its sites."""

from __future__ import annotations

from wooflux.actions import (
    Dispatcher,
    LoadAccount,
    LoadAndSynchronizeSiteIfNeeded,
    LoadSite,
    SynchronizeAccount,
    SynchronizeSites,
)
from wooflux.kernel.errors import NotFoundError, describe_error
from wooflux.kernel.types import Err, Ok
from wooflux.models import Account, Site
from wooflux.networking import AccountRemote, Network
from wooflux.storage import StorageManager
from wooflux.stores.base import Store, handles
from wooflux.stores.tasks import TaskRunner


class AccountStore(Store):
    """State: ``account`` (last synchronized account) and ``sites``."""

    initial_state = {"account": None, "sites": ()}

    def __init__(
        self,
        dispatcher: Dispatcher,
        storage_manager: StorageManager,
        network: Network,
        *,
        remote: AccountRemote | None = None,
        tasks: TaskRunner | None = None,
    ) -> None:
        self._remote = remote or AccountRemote(network)
        super().__init__(dispatcher, storage_manager, network, tasks=tasks)

    @handles(LoadAccount)
    def _load_account(self, action: LoadAccount) -> None:
        action.on_completion(
            self.storage_manager.first(Account, lambda a: a.user_id == action.user_id)
        )

    @handles(LoadSite)
    def _load_site(self, action: LoadSite) -> None:
        action.on_completion(self._stored_site(action.site_id))

    @handles(SynchronizeAccount)
    def _synchronize_account(self, action: SynchronizeAccount) -> None:
        self.run(self._synchronize_account_async(action), action)

    @handles(SynchronizeSites)
    def _synchronize_sites(self, action: SynchronizeSites) -> None:
        self.run(self._synchronize_sites_async(action), action)

    @handles(LoadAndSynchronizeSiteIfNeeded)
    def _load_and_synchronize_site(self, action: LoadAndSynchronizeSiteIfNeeded) -> None:
        site = self._stored_site(action.site_id)
        if site is not None:
            action.on_completion(Ok(site))
            return
        self.run(self._synchronize_then_load_site(action), action)

    async def _synchronize_account_async(self, action: SynchronizeAccount) -> None:
        try:
            account = await self._remote.load_account()
            self.storage_manager.upsert(account)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("account_sync_failed", error=describe_error(exc))
            action.on_completion(Err(exc))
            return
        self.update_state(account=account)
        action.on_completion(Ok(account))

    async def _synchronize_sites_async(self, action: SynchronizeSites) -> None:
        try:
            sites = await self._store_sites()
        except Exception as exc:  # noqa: BLE001
            self._log.warning("sites_sync_failed", error=describe_error(exc))
            action.on_completion(Err(exc))
            return
        self.update_state(sites=tuple(sites))
        action.on_completion(Ok(None))

    async def _synchronize_then_load_site(self, action: LoadAndSynchronizeSiteIfNeeded) -> None:
        try:
            sites = await self._store_sites()
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "sites_sync_failed", site_id=action.site_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        self.update_state(sites=tuple(sites))
        site = self._stored_site(action.site_id)
        if site is None:
            action.on_completion(Err(NotFoundError("Site", action.site_id)))
            return
        action.on_completion(Ok(site))

    async def _store_sites(self) -> list[Site]:
        """Replace stored sites with the remote list; sites gone remotely are deleted."""
        sites = await self._remote.load_sites()
        remote_ids = {site.site_id for site in sites}
        self.storage_manager.delete_where(Site, lambda s: s.site_id not in remote_ids)
        self.storage_manager.upsert_all(sites)
        return sites

    def _stored_site(self, site_id: int) -> Site | None:
        return self.storage_manager.first(Site, lambda s: s.site_id == site_id)


__all__ = ["AccountStore"]
