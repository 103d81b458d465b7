HOMEPAGE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>URL Shortener</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            max-width: 600px;
            margin: 100px auto;
            padding: 20px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
        }
        .container {
            background: white;
            padding: 40px;
            border-radius: 10px;
            box-shadow: 0 10px 40px rgba(0, 0, 0, 0.2);
        }
        h1 { color: #333; text-align: center; margin-bottom: 30px; }
        input[type="url"] {
            width: 100%;
            padding: 15px;
            font-size: 16px;
            border: 2px solid #ddd;
            border-radius: 5px;
            box-sizing: border-box;
            margin-bottom: 15px;
        }
        input[type="url"]:focus { outline: none; border-color: #667eea; }
        button {
            width: 100%;
            padding: 15px;
            font-size: 16px;
            background: #667eea;
            color: white;
            border: none;
            border-radius: 5px;
            cursor: pointer;
            font-weight: bold;
        }
        button:hover { background: #5568d3; }
        #result {
            margin-top: 20px;
            padding: 15px;
            background: #f0f9ff;
            border-radius: 5px;
            display: none;
            word-break: break-all;
        }
        #result a { color: #667eea; text-decoration: none; font-weight: bold; }
        #copy { margin-top: 10px; width: auto; padding: 10px 20px; }
        .success { color: #10b981; font-weight: bold; }
        .error { color: #dc2626; }
    </style>
</head>
<body>
    <div class="container">
        <h1>URL Shortener</h1>
        <form id="shortenForm">
            <input type="url" name="url" placeholder="Enter your long URL here (e.g., https://example.com)" required />
            <button type="submit">Shorten URL</button>
        </form>
        <div id="result">
            <p id="status"></p>
            <p><a id="link" target="_blank"></a></p>
            <button id="copy" type="button">Copy to Clipboard</button>
        </div>
    </div>

    <script>
        const form = document.getElementById('shortenForm');
        const result = document.getElementById('result');
        const statusLine = document.getElementById('status');
        const link = document.getElementById('link');
        const copy = document.getElementById('copy');

        form.addEventListener('submit', async (e) => {
            e.preventDefault();
            try {
                const response = await fetch('shorten', {
                    method: 'POST',
                    headers: {'Content-Type': 'application/x-www-form-urlencoded'},
                    body: new URLSearchParams({url: form.url.value}),
                });
                const text = await response.text();
                if (!response.ok) {
                    throw new Error(text);
                }
                statusLine.className = 'success';
                statusLine.textContent = 'Success! Your shortened URL:';
                link.href = text;
                link.textContent = text;
                copy.style.display = '';
                form.reset();
            } catch (error) {
                statusLine.className = 'error';
                statusLine.textContent = 'Error: ' + error.message;
                link.textContent = '';
                copy.style.display = 'none';
            }
            result.style.display = 'block';
        });

        copy.addEventListener('click', () => {
            navigator.clipboard.writeText(link.textContent).then(() => alert('Copied to clipboard!'));
        });
    </script>
</body>
</html>
"""
