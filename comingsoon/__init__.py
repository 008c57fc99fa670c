"""Coming-soon landing page with a mailto contact form."""
