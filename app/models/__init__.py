from app.models.user import User
from app.models.book import Book
from app.models.transaction import Transaction
from app.models.review import Review
from app.models.subscription import Subscription

# add ALL models here
