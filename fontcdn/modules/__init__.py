"""Feature modules, one router/service/schemas set each."""
