from .extensions import db

class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(120), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255), nullable=False)  # demo: stored as plain text
    full_name = db.Column(db.String(200), nullable=True)

class Course(db.Model):
    __tablename__ = "course"
    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(40))
    title = db.Column(db.String(200))
    description = db.Column(db.Text, nullable=True)
    credit = db.Column(db.Integer)

class Order(db.Model):
    __tablename__ = "orders"
    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(80))
    customer_name = db.Column(db.String(200))
    total_amount = db.Column(db.Float)
    status = db.Column(db.String(40))  # e.g. CREATED / PAID / CANCELED
    created_at = db.Column(db.DateTime)  # set once by the create route

class Product(db.Model):
    __tablename__ = "product"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200))
    category = db.Column(db.String(120))
    price = db.Column(db.Float)
    stock = db.Column(db.Integer)

class Student(db.Model):
    __tablename__ = "student"
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(50))
    last_name = db.Column(db.String(120))
    email = db.Column(db.String(255))
