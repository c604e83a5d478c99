# State - in-memory stores
