# affinity_suggester/utils/__init__.py
# helpers living around the core: logging, JSON config, corpus files
