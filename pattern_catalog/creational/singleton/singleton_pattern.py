"""Shows that AppSettings always hands out the same instance."""
from pattern_catalog.creational.singleton.app_settings import AppSettings


def main() -> None:
    app_settings = AppSettings.get_instance()
    copy_app_settings = AppSettings.get_instance()

    print(app_settings is copy_app_settings)


if __name__ == "__main__":
    main()
