"""
Command Line Interface Package

Click command groups for the `xrplsale` executable.

Command Structure:
- xrplsale auth: login (API key or wallet), logout, status, API key management
- xrplsale projects: list, get, create, launch, stats
- xrplsale investments: list, get, create
- xrplsale analytics: platform overview, per-project metrics
- xrplsale webhooks: list, create, delete, test
- xrplsale config: stored settings
- xrplsale init: project definition scaffolding

Global options (--json, --debug, --environment, ...) are parsed by the root
group into a CliContext that every command receives.
"""
