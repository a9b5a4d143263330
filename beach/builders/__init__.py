"""Fluent builders for Beach expressions, statements, functions and programs."""