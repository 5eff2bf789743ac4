#!/usr/bin/env python3
"""
Calculation layer: pure derivations, time conversion, planet pipeline,
moon/sun composites and the unified facade
"""
