# Status - optional health endpoint
