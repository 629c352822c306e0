from .collect_names import NameCollector, NameContext, collect_names, free_names
