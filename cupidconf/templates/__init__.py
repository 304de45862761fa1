#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CupidConf Templates
===================

Contains templates for the display of loaded configuration entries.
"""

__date__ = "2026-10-17"

import os

import jinja2

templates_dir = os.path.dirname(__file__)

with open(os.path.join(templates_dir, "show.jinja"), encoding="utf-8") as in_f:
    show_template = jinja2.Template(in_f.read())
