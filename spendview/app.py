"""Application context and dependency injection.

The ApplicationContext wires settings and services together and provides
them to the request layer.
"""

import logging
from typing import Optional

from spendview.domain.settings import AppSettings
from spendview.services.aggregation import AggregationService
from spendview.services.charts import ChartViewBuilder
from spendview.services.dashboard import DashboardService
from spendview.services.filtering import FilterService
from spendview.services.period import PeriodResolver
from spendview.state.persistence import SettingsStore

logger = logging.getLogger(__name__)


class ApplicationContext:
    """Application context providing dependency injection.

    Services are stateless, so one context can serve concurrent requests as
    long as each request passes its own transaction snapshot.

    Example:
        >>> ctx = ApplicationContext()
        >>> view = ctx.dashboard.build(transactions, period="this_month")
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        settings_store: Optional[SettingsStore] = None,
    ):
        """Initialize application context.

        Args:
            settings: Explicit settings. Takes precedence over the store.
            settings_store: Store to load settings from when none are given
        """
        self.settings_store = settings_store
        if settings is None:
            settings = settings_store.load() if settings_store else AppSettings()
        self.settings = settings

        self.resolver = PeriodResolver()
        self.filter_service = FilterService(self.resolver)
        self.aggregation = AggregationService()
        self.charts = ChartViewBuilder(aggregation=self.aggregation, settings=settings)
        self.dashboard = DashboardService(
            settings=settings,
            filter_service=self.filter_service,
            aggregation=self.aggregation,
            charts=self.charts,
        )

    def configure_logging(self) -> None:
        """Apply the configured log level to the spendview loggers."""
        level = logging.getLevelName(self.settings.logging.level)
        logging.getLogger("spendview").setLevel(level)
        logger.debug(f"Log level set to {self.settings.logging.level}")

    def save_settings(self) -> None:
        """Persist current settings, if a store is configured."""
        if self.settings_store is not None:
            self.settings_store.save(self.settings)
