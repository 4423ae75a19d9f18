"""Round generation engine.

Modules, leaf first: ``pair_key``, ``court_format``, ``enumerator``,
``scorer``, ``selector``. Import from the modules directly; this package
stays import-free so the models can use ``pair_key`` without a cycle.
"""
