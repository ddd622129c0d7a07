"""Запуск через python -m docker_manager_api."""

import sys

from docker_manager_api.main import main

sys.exit(main())
