"""Infrastructure modules for the site.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, ServerSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale routing and translation resolution
- models: Shared Pydantic model configuration
- services: Dependency injection services (SettingsDep, I18nServiceDep, get_settings)
"""
