# Closed sets the directory, the profile form and the chat search all agree on.
SERVICES = ("Plumbing", "Electrical", "Carpentry", "Painting", "Landscaping", "Roofing")
REGIONS = ("Northern Beaches, NSW", "Brisbane, QLD")

SOCIAL_NETWORKS = ("facebook", "instagram", "linkedin", "twitter", "youtube", "tiktok")
