# designdemos

This package has two small domains. Each one shows the same features in two
forms: first as a single class that does everything, then split into focused
parts that can be replaced.

- **Ride sharing.** `designdemos.simple_rides` has one class that holds the
  vehicles, the rides, the status and the file saving. `designdemos.rides`
  splits this into vehicles, rides, a `RideManager` and storage back ends that
  can be swapped (`FileStorage` and `DBStorage`).
- **Bazaar marketplace.** This covers:
  - `designdemos.catalog`: sellers, products, a cart for each user and users.
  - `designdemos.orders`: delivery and pickup orders, made by factories for
    "now" or "scheduled".
  - `designdemos.payments`: payment strategies.
  - `designdemos.managers`: seller and order registries, each shared through
    `get_instance()`.
  - `designdemos.notifications`: the notification service.
  - `designdemos.bazaar`: the `Bazaar` front end that ties these together.

## Installation

```
pip install .
```

To install the test dependencies too and run the tests:

```
pip install ".[test]"
pytest
```

## Command-line demos

Each demo runs a short fixed scenario and prints what happens:

```
designdemos-simple-rides
designdemos-rides
designdemos-bazaar
```

The two ride demos book a bike ride, print its status and write the ride
details to `ride_details.txt` in the current directory.

The bazaar demo does the following:

1. Finds the seller that sells clothing.
2. Adds two product codes to the cart. Only the seller's matching products are
   added.
3. Prints the cart.
4. Checks out a delivery order that is paid through JazzCash.
5. Prints the payment receipt and the order notification.

## Using the library

### Simple rides

```python
from designdemos.simple_rides import SimpleRideSharingApp

app = SimpleRideSharingApp()
app.add_vehicle("Honda Bike")
app.book_ride("Honda Bike", "Gulberg to Mall Road")   # True
app.track_ride_status()                               # "Driver Assigned"
app.save_ride_details("rides.txt")
```

`book_ride` needs the exact vehicle name. If no vehicle has that name, it
returns `False` and the status becomes `"Vehicle Not Found"`.

### Rides

```python
from designdemos.rides import BikeVehicle, CarVehicle, DBStorage, RideSharingApp

app = RideSharingApp(storage=DBStorage())
app.add_vehicle(BikeVehicle("Honda Bike"))
app.add_vehicle(CarVehicle("Suzuki Mehran"))
ride = app.book_ride("Honda Bike", "Gulberg to Mall Road")

ride.details()              # "Bike: Honda Bike to Gulberg to Mall Road (Driver Assigned)"
app.track_ride_status(0)    # "Driver Assigned"
app.save_ride_details()
```

`RideSharingApp(storage=None, manager=None)` uses a `FileStorage` and a new
`RideManager` when these arguments are not given. `FileStorage(path)` writes to
`ride_details.txt` unless you pass another path.

Booking and status lookups behave as follows:

- `book_ride` books on the first vehicle whose `details()` contain the requested
  text and returns the new `Ride`.
- If no vehicle matches, `book_ride` raises `VehicleNotFoundError`.
- `track_ride_status` raises `IndexError` for an index that has no ride.

### Bazaar

```python
from designdemos.bazaar import Bazaar
from designdemos.catalog import User
from designdemos.payments import CreditCardPayment

bazaar = Bazaar()
user = User("1001", "Ahmed", "Karachi")

sellers = bazaar.search_products_by_category("Clothing")
bazaar.select_seller(user, sellers[0])
bazaar.add_to_cart(user, "SK001")
bazaar.print_user_cart(user)

order = bazaar.checkout_now(user, CreditCardPayment("card-placeholder"), "Pickup")
bazaar.pay_for_order(order)
```

When a `Bazaar` is created, it adds the seller "Anarkali Shop" (Lahore) and that
seller's two products to its seller manager. By default the seller manager and
the order manager are the shared instances from `SellerManager.get_instance()`
and `OrderManager.get_instance()`. You can pass your own managers to keep
bazaars apart.

Checking out takes three things:

- a payment strategy: `CreditCardPayment` or `JazzCashPayment`;
- an order type: `"Delivery"` or `"Pickup"`;
- `checkout_now` or `checkout_scheduled`.

An order made by `checkout_now` is labelled `"Current Time"`. An order made by
`checkout_scheduled` is always labelled `"Scheduled Time"`; the time you pass
is not used.

`pay_for_order` does three things:

1. It pays the order total and prints the receipt.
2. It prints a notification. `format_notification` builds the same text.
3. It empties the user's cart.

These cases raise errors:

| Case | Error |
| --- | --- |
| adding to the cart before a seller is selected | `NoSellerSelectedError` |
| checking out an empty cart | `EmptyCartError` |
| an order type other than `"Delivery"` or `"Pickup"` | `UnknownOrderTypeError` |
| paying for an order that has no payment strategy | `PaymentError` |

## What this package does not do

- No payment is sent anywhere. The payment strategies only print and return a
  receipt line.
- `DBStorage` does not connect to a database. It prints the content it was given.
- Orders, sellers and carts live only in memory. Only the ride details can be
  saved, and they are saved as a text file.