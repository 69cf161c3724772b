# -*- coding: utf-8 -*-
"""
KPIs for cutting solutions.
"""
