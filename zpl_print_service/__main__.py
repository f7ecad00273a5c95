"""
Run the ZPL Print Service web application.

    python -m zpl_print_service
"""

from .app import main

if __name__ == '__main__':
    main()
