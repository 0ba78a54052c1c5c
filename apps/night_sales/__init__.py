"""Night sales: cash handed over by cooks, credited to capital on acceptance."""
