"""Domain layer: the target model and integration rules, free of adapters."""
