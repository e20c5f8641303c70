#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Direct startup script for the Hello CRM service.

Equivalent to ``python -m hello_crm``. A bind failure is left uncaught so
the process exits non-zero with the traceback on stderr.
"""
from hello_crm.__main__ import main

if __name__ == "__main__":
    main()
