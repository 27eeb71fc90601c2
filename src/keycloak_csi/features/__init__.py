"""Feature modules for keycloak-csi."""
