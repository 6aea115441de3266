# Role-routed, retrieval-grounded assistant service.
