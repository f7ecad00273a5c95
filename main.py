#!/usr/bin/env python
"""
ZPL Print Service - Standalone Entry Point

Run directly:
    python main.py

Or with environment variables:
    ZPL_PRINT_PORT=5200 ZPL_PRINT_REGISTRY=memory python main.py
"""

from zpl_print_service.app import main


if __name__ == '__main__':
    main()
