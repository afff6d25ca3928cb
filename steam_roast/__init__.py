"""
Steam Roast
===========

Turns a Steam library's playtime stats into a short roast, either from a
remote text-generation backend or from the local template bank.

Modules:
- core/ : stats, personality, templates, fallback, remote requester, orchestrator
- generators/ : text-generation backend clients
- cli/ : request boundary and command-line entry point
"""
