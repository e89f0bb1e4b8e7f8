"""HTTP access to the godocs API."""
