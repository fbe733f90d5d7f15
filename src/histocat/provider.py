"""Historic-events provider: the one entry point a host application calls.

The host (a genealogy web application, the CLI, the HTTP API) supplies two
things:

- the language tag of the current request, per call;
- a *preference source*, a zero-argument callable returning the tree's note
  format preference (``"markdown"`` or anything else).

The preference source is read at most once per :meth:`list_events` call and
the resulting mode is used for every record of that call. Passing `mode`
explicitly bypasses the source entirely.

Example
-------
>>> provider = HistoricEventsProvider(preference_source=lambda: "markdown")
>>> provider.list_events("fr")[0].splitlines()[0]
'1 EVEN Philippe VI de Valois roi de France'
>>> provider.list_events("de")
[]
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from histocat.catalog import EventCatalog, default_catalog
from histocat.core.renderer import render
from histocat.core.rendering import RenderingMode, resolve_mode
from histocat.core.settings import get_logger

PreferenceSource = Callable[[], str | None]

logger = get_logger(__name__)


class ModuleInfo(BaseModel):
    """Descriptive metadata a host shows in its module administration page."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    author: str
    version: str
    latest_version_url: HttpUrl
    support_url: HttpUrl
    enabled_by_default: bool = Field(default=False)


MODULE_INFO = ModuleInfo(
    title="Faits historiques de France et d’ailleurs 🇪🇺",
    description="Variante de FrenchHistory.php pour webtrees 2.2",
    author="gustine@ovh.fr",
    version="2025.12.29",
    latest_version_url="https://gustine.eu/mode_emploi/gustine-history/latest-version22.txt",
    support_url="https://gustine.eu/mode_emploi/gustine-history.php",
    enabled_by_default=False,
)


def _no_preference() -> str | None:
    return None


class HistoricEventsProvider:
    """Serve rendered event blocks for a language tag."""

    def __init__(
        self,
        catalog: EventCatalog | None = None,
        preference_source: PreferenceSource | None = None,
        info: ModuleInfo = MODULE_INFO,
    ) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()
        self._preference_source = preference_source or _no_preference
        self.info = info

    @property
    def catalog(self) -> EventCatalog:
        return self._catalog

    def current_mode(self) -> RenderingMode:
        """Read the preference source once and resolve it to a mode."""
        return resolve_mode(self._preference_source())

    def list_events(self, language_tag: str, *, mode: RenderingMode | None = None) -> list[str]:
        """Return every event block for `language_tag`, in curated order.

        Unsupported tags return ``[]`` without consulting the preference source.
        """
        dataset = self._catalog.dataset(language_tag)
        if dataset is None:
            logger.debug("Language %r not supported; returning no events", language_tag)
            return []
        active = mode if mode is not None else self.current_mode()
        return list(
            render(
                dataset.events,
                active,
                labels=dataset.categories,
                link_label=dataset.link_label,
            )
        )


__all__ = ["MODULE_INFO", "HistoricEventsProvider", "ModuleInfo", "PreferenceSource"]
