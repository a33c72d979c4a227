"""Infrastructure modules for the translator.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Fluent translation loading and rendering (Translator)
- services: Dependency injection services (SettingsDep, TranslatorDep, get_translator)
"""
