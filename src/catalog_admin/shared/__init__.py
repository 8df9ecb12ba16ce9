"""🧰 Спільні утиліти пакета `catalog_admin`."""
