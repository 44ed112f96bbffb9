import logging
import os

from dotenv import load_dotenv

# .env 需在读取 Config 之前加载
load_dotenv()

from amenity_map import create_app  # noqa: E402

logging.basicConfig(level=logging.INFO)

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get("PORT", 5000))
    app.run(port=port, debug=app.config['DEBUG'])
