"""App Store Connect tool groups, one module per area, discovered by the registry."""
