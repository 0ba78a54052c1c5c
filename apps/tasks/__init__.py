"""Daily to-do list scoped per date."""
