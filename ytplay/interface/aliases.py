# ytplay/interface/aliases.py

COMMAND_ALIASES = {
    "p": "parse",
    "pr": "probe",
    "cfg": "config",
}
